"""dorkhound adapter package.

Architectural role:
- Defines the external interaction boundary (command line).
- Performs argument dispatch and output formatting only.
- Delegates searching and parsing to registered engines.
"""
