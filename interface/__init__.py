"""
Interface package: text protocols for the chess companion.

Modules:
    uci — Universal Chess Interface (UCI) handler with a "hint" extension.
          Reads commands from stdin, writes responses to stdout.
          Can be run as a standalone script: python interface/uci.py
"""
