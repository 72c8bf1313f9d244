"""
Parking Visualizer: animated bubble, selection, insertion and merge sort
on a parking lot of randomly sized cars.
"""
__version__ = "1.0.0"
