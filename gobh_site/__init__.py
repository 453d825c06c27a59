"""
GOBH Investments marketing site package.
"""
__version__ = "1.0.0"
