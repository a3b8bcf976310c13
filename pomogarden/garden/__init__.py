"""
Garden module.

Holds the growth model (staged plots or a flat plant count), its JSON
codec and the store that persists it after every growth event.
"""
