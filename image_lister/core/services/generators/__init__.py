"""
Generators — render source files from the project's assets.

Each generator module exposes pure render functions plus a ``build_*()``
function that returns a ``GeneratedFile``.
"""
