import logging

import boto3

from .config import Settings
from .dispatcher import ItemDispatcher
from .storage import DynamoItemStore

settings = Settings.from_env()

logger = logging.getLogger()
logger.setLevel(settings.log_level)

# Built once per container and reused across invocations.
ddb = boto3.resource("dynamodb")
dispatcher = ItemDispatcher(
    DynamoItemStore(ddb.Table(settings.table_name)),
    strict_params=settings.strict_params,
)


def handler(event, context):
    if context is not None:
        logger.info("Request ID: %s", getattr(context, "aws_request_id", None))
        logger.info("Function Name: %s", getattr(context, "function_name", None))
    return dispatcher.handle_event(event).to_dict()


lambda_handler = handler
