# Path: scripts/__init__.py
# Purpose: Package initializer for command-line entrypoints.
# Layer: scripts.
# Details: Lets the console script resolve scripts.filter_images:main after installation.
