import os

# headless runs: never open a GUI window
os.environ.setdefault("MPLBACKEND", "Agg")
