"""Core data model and encoding modules.

WHY: The core package holds the stable heart of the encoder: the part
tree dataclasses and the logic that turns them into bytes. The CLI and
any other front end only consume these modules.

HOW: ir.py defines the tree, fields.py renders single header fields,
encoder.py walks the tree, builders.py creates common container shapes,
loader.py reads trees from JSON documents.

RULES:
- IR dataclasses are the contract; change with care
- encoder.py and fields.py are pure: no I/O, no global state
"""
