"""Core translation logic for the Pig Latin translator.

Contains the data model (ir.py), the single-word rules (word.py), and the
space-tokenizing text wrapper (text.py). Everything here is pure.
"""
