"""Routing — pattern compilation and an ordered route table.

Patterns compile into static and parameter segments; the router scans
routes in registration order and the first full match wins.
"""
