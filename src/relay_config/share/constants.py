DISPLAY_NAME = "Global CollabNet Teamforge Configuration"

# Submission field names
CONNECTION_FACTORY = "connectionFactory"
MQ_HOST = "actionHubMqHost"
MQ_PORT = "actionHubMqPort"
MQ_USERNAME = "actionHubMqUsername"
MQ_PASSWORD = "actionHubMqPassword"
MQ_EXCHANGE = "actionHubMqExchange"
MQ_WORKFLOW_QUEUE = "actionHubMqWorkflowQueue"
MQ_ACTIONS_QUEUE = "actionHubMqActionsQueue"
MSG_INCLUDE_RADIO = "actionHubMsgIncludeRadio"
MSG_MANUAL = "actionHubMsgManual"
MSG_WORKITEM = "actionHubMsgWorkitem"
MSG_COMMIT = "actionHubMsgCommit"
MSG_BUILD = "actionHubMsgBuild"
MSG_REVIEW = "actionHubMsgReview"
MSG_CUSTOM = "actionHubMsgCustom"
MSG_CUSTOM_TXT = "actionHubMsgCustomTxt"

INCLUDE_ALL = "all"
INCLUDE_SELECTED = "selected"

# Live validation messages
ERROR_MSG_HOST = "Please enter the ActionHub message queue host."
ERROR_MSG_PORT = "Please enter a valid ActionHub message queue port."
ERROR_MSG_USERNAME = "Please enter the ActionHub message queue username."
ERROR_MSG_PASSWORD = "Please enter the ActionHub message queue password."
ERROR_MSG_EXCHANGE = "Please enter the ActionHub exchange name."
ERROR_MSG_ROUTING_KEY_WF = "Please enter the ActionHub workflow routing key."
ERROR_MSG_ROUTING_KEY_ACTIONS = "Please enter the ActionHub actions routing key."

MAX_PORT = 65535
