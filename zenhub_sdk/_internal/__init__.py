"""Internal modules for ZenHub SDK.

WARNING: These modules are the request-dispatch layer behind `ZenHub`.
They are not intended for direct use in application code.

Modules:
    rest - REST dispatcher with rate-limit retry
    graphql - GraphQL dispatcher and query documents
    http - Shared HTTP client configuration
"""
