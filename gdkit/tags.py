"""Standard tag names used as keys in structured logs and metadata."""

APP = "app"
ENV = "env"
TIME = "time"
METHOD = "method"
# Process resulting status: "attempt", "success", "error" or "expected_error".
METRIC_STATUS = "metric_status"
CODE = "code"
ERROR = "err"
REQUEST = "request"
RESPONSE = "response"
LATENCY = "latency"
# Unique identifier of each operation.
REQUEST_ID = "request_id"
ACTOR_ID = "actor_id"
# Identifier of the entity the operation works on, not unique per operation.
CONTEXT_ID = "context_id"
# Original line where the error was received or created.
ERROR_LINE = "err_line"
STACK_TRACE = "stack_trace"
PANIC = "panic"
MESSAGE = "message"
DETAIL = "detail"
FIELDS = "fields"
USER = "user"
HASH = "hash"
BUILD = "build"
OPS = "ops"
TOPIC = "topic"
CHANNEL = "channel"
ADD_MENTION = "add_mention"
TEMPLATE = "template"
DATABASE = "database"
SETTING = "setting"
UUID = "uuid"
FILTER_TYPE = "filter_type"
TOTAL_DATA = "total_data"
LIMIT = "limit"
OFFSET = "offset"
WITHOUT_CACHE = "without_cache"
SHARED = "shared"
KEY = "key"
ADDRESS = "address"
HOSTNAME = "hostname"
KIND = "kind"
COUNT = "count"
DURATION = "duration"
MODE = "mode"
URL = "url"
EVENT = "event"
OPEN_CONNECTIONS = "open_connections"
OPEN_CONNECTION_ALERT_THRESHOLD = "open_connection_alert_threshold"
MAX_OPEN_CONNECTIONS = "max_open_connections"
IN_USE = "in_use"
IDLE = "idle"
WAIT_COUNT = "wait_count"
WAIT_DURATION = "wait_duration"
MAX_IDLE_CLOSED = "max_idle_closed"
MAX_LIFETIME_CLOSED = "max_lifetime_closed"
METADATA = "metadata"
CACHE = "cache"
CLIENT = "client"
TYPE = "type"
INDEX = "index"
HTTP_STATUS = "http_status"
HTTP_METHOD = "http_method"