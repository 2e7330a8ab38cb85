"""
Services for fossilvc.

process/ runs the fossil executable; vcs/ parses what it prints.
"""
