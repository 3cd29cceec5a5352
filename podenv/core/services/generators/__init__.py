"""
Generators — produce build artifacts from installed pod information.

Each generator exposes ``render()`` for the raw text, ``generate()``
returning a ``GeneratedFile``, and ``save_as()`` to write it to disk.
"""
