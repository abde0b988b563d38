"""
vsixpack: build VS Code extension packages (.vsix) from a directory and its
package.json.
"""

__version__ = "0.3.0"
