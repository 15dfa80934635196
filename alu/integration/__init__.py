"""
Integration layer: program files and the command line.
"""
