# topmark:header:start
#
#   project      : jsdoc2rst
#   file         : __init__.py
#   file_relpath : src/jsdoc2rst/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""jsdoc2rst command-line interface (Click)."""
