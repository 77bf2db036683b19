"""Core modeling and generation modules.

WHY: The core package holds the only parts with real algorithmic
content: the tokenizer, the model, the builder, the backtracking
synthesizer, and the renderer. CLI and printing sit on top of it.

HOW: model.py defines the data structures, tokenizer.py and builder.py
produce them from text, synthesizer.py searches them, renderer.py turns
a found path into a string.

RULES:
- Model dataclasses are the contract between building and searching
- Core modules never print; output belongs to the CLI and formatters
"""
