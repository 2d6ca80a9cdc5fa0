"""Resolver package for the GraphQL schema.

Resolvers read and append records through the store found in the request
context and convert store records into Strawberry types.
"""
