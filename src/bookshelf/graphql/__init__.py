"""
GraphQL layer: Strawberry types, root operations and resolvers
"""
