"""
Shared defaults for the trainer, the synthetic demo data and the CLI.
"""

# scipy.optimize.minimize method used by the trainer (truncated Newton, as in fmin_tnc)
DEFAULT_METHOD = "TNC"
# None leaves the iteration cap to scipy's own default for the chosen method
DEFAULT_MAX_ITER = None

# Synthetic curve clouds
DEFAULT_N_PER_CLASS = 100
DEFAULT_NOISE = 0.3
DEFAULT_GAP = 2.5

DEFAULT_LABEL_COL = "label"
DEFAULT_TEST_SIZE = 0.2
RANDOM_STATE = 42

# Resolution of the meshgrid used for the decision-region overlay
PLOT_GRID_STEPS = 200
CLASS_COLORS = ("tab:blue", "tab:orange")
