import matplotlib.pyplot as plt
import numpy as np

import offsetticks

# A coordinate around one million with small variations
x = 1e6 + np.arange(123, 146)
y = np.sin(np.radians(x)) + np.log(x)

fig, (ax_live, ax_once) = plt.subplots(1, 2, figsize=(10, 4), layout="constrained")

ax_live.plot(x, y)
ax_live.set_title("Live offset labels (zoom/pan to update)")
# No format: the default number conversion, still updated live
offsetticks.offset_ticks(ax_live, "x")
offsetticks.offset_ticks(ax_live, "y", "%.3f V")

ax_once.plot(x, y)
ax_once.set_title("One-shot offset labels, grouped digits")
with offsetticks.config.temp(grouping=True):
    offsetticks.apply_offset_labels(ax_once.xaxis)
ax_once.yaxis.set_major_formatter(offsetticks.OffsetTickFormatter("%.2f"))

plt.show()
