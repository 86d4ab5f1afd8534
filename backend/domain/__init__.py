"""Domain layer for weight and goal tracking.

Value objects, entities and repository ports, free of any infrastructure
dependency.
"""
