"""plistutil — convert property lists between binary, XML, and JSON.

WHY: Property lists travel in three encodings (the compact ``bplist00``
binary form, XML, and JSON) and tools rarely accept more than one of
them. This package converts a single document between any of them in one
shot, so it can sit in a shell pipeline.

HOW: Four-stage pipeline — acquire (file or stdin), dispatch (parse with
one codec, serialize with another), write (file or stdout), translate
(stage results to an exit status). Codecs live in ``plistutil.formats``.

RULES:
- One document per invocation, fully buffered in memory
- Nothing is written unless parsing and serialization both succeed
- Diagnostics go to stderr, converted bytes to stdout or the output file
"""

__version__ = "2.3.0"
