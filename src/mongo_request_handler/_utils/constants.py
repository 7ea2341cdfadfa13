# Environment variables
ENV_BASE_URL = "MONGODB_DATA_API_URL"
ENV_APP_ID = "MONGODB_APP_ID"
ENV_REGION = "MONGODB_REGION"
ENV_DATA_SOURCE = "MONGODB_DATA_SOURCE"
ENV_DATABASE = "MONGODB_DATABASE"
ENV_API_KEY = "MONGODB_API_KEY"

# Data API
DEFAULT_REGION = "ap-southeast-1"
DATA_API_URL_TEMPLATE = (
    "https://{region}.aws.data.mongodb-api.com/app/{app_id}/endpoint/data/v1/action"
)

# Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_API_KEY = "api-key"
CONTENT_TYPE_JSON = "application/json"

# Request body fields injected from the configuration
BODY_DATA_SOURCE = "dataSource"
BODY_DATABASE = "database"
