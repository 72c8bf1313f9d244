"""
The MODEL layer contains pure data structures and the sorting logic.
It has NO knowledge of the GUI (Qt).
It deals with car sizes, sort steps and the parking lot geometry.
"""
