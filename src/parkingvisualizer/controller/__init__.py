"""
The CONTROLLER layer runs the sort animations off the GUI thread.
"""
