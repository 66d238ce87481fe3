"""Conversion pipeline stages and their data model.

WHY: The core package holds the control flow of a conversion: acquiring
input, choosing and running codecs, writing output, and turning stage
results into an exit status. The codecs themselves live in formats/.

HOW: ir.py defines the data structures, acquire.py reads input,
dispatcher.py runs parse and serialize, output.py writes the result,
outcome.py maps results to exit codes.

RULES:
- The IR dataclasses are what stages exchange; keep them stable
- Nothing in core knows how an encoding is laid out
"""
