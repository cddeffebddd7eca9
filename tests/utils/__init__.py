# topmark:header:start
#
#   project      : ByteDent
#   file         : __init__.py
#   file_relpath : tests/utils/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end
