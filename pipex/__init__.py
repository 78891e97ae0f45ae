"""Run two commands joined by a pipe, reading from one file and writing to another, plus small string, character, memory and number helpers."""

__version__ = "0.1.0"