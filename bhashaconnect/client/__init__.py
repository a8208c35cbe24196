from bhashaconnect.client.api_client import ApiRequestError, BhashaClient, ClientError, OfflineMutationBlocked
from bhashaconnect.client.context import ClientContext
from bhashaconnect.client.mirror import ConnectivityState, OfflineMirror

__all__ = [
	"ApiRequestError",
	"BhashaClient",
	"ClientContext",
	"ClientError",
	"ConnectivityState",
	"OfflineMirror",
	"OfflineMutationBlocked",
]
