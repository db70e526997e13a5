from .api_targets import TargetResolver, build_api_targets, static_resolver
from .infra_api import InfraApiClient, decode_json_response, post_json_with_fallback

__all__ = [
    "InfraApiClient",
    "TargetResolver",
    "build_api_targets",
    "decode_json_response",
    "post_json_with_fallback",
    "static_resolver",
]
