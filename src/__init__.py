"""Application Layer.

Infrastructure adapters that feed the domain. This layer handles I/O such as
reading threat files and hands domain Value Objects to the exploration context.
"""
