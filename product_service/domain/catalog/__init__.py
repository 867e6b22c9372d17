"""
Catalog bounded context, domain layer.

Products sold by stores: the Product entity, its field rules,
the error taxonomy and the persistence port.
"""
