import matplotlib

# Headless backend for the preview tests
matplotlib.use("Agg")
