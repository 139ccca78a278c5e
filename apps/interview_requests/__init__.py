"""
Interview requests: the record store and its REST API.
"""
