"""JSON web API for quill (Flask). Run with `python -m frontend --dict words.txt`."""
