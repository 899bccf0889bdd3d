"""
The MODEL layer contains pure data structures and ordering logic.
It has NO knowledge of the GUI (Qt).
It deals with Records, their ranking and the authoritative sorted collection.
"""
