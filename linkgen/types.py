from typing import Any

# Type aliases for API Gateway / Lambda payloads
type LambdaEvent = dict[str, Any]
type LambdaContext = Any
type LambdaResponse = dict[str, Any]
type AppConfig = dict[str, Any]
