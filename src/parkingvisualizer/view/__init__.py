"""
The VIEW layer contains the Qt widgets. It reads from the model and never
runs a sort itself.
"""
