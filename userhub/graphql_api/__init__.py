from userhub.graphql_api.schema import create_graphql_router, schema

__all__ = ["create_graphql_router", "schema"]
