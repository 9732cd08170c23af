"""Routing — compiled route table with depth-first, first-match resolution.

Routes are declared once at router construction and compiled into an
immutable tree of path matchers. There is no route mutation afterwards.
"""
