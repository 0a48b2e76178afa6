"""
GraphQL API package.

``schema.py`` defines the query root and builds the ``GraphQLRouter``
that ``main`` mounts at ``/graphql``.  ``types.py`` holds the object
types and ``loaders.py`` the request‑scoped comment loader used by the
derived ``Post.comments`` field.
"""
