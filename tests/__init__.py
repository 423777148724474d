"""
Only the root tests directory carries an __init__.py; the subdirectories act as
namespace packages (PEP 420) so that pytest resolves test modules consistently.
"""
