"""
Domain layer: the User entity, its input parameter types, field rules and
the UserStore contract. Nothing here performs I/O.
"""
