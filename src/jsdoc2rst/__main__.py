# topmark:header:start
#
#   project      : jsdoc2rst
#   file         : __main__.py
#   file_relpath : src/jsdoc2rst/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running jsdoc2rst via ``python -m jsdoc2rst``.

It delegates directly to :func:`jsdoc2rst.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how jsdoc2rst is launched.

Examples:
    Convert a script from STDIN::

        python -m jsdoc2rst mypkg < mypkg.js
"""

from __future__ import annotations

from jsdoc2rst.cli.main import cli

if __name__ == "__main__":
    cli()
