from adopr.infra.azure_devops.client import AzureDevOpsClient, JsonResponse
from adopr.infra.azure_devops.pr_source import AzureDevOpsPRSource, parse_timestamp

__all__ = [
    "AzureDevOpsClient",
    "AzureDevOpsPRSource",
    "JsonResponse",
    "parse_timestamp",
]
