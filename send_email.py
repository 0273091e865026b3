# API Gateway Trigger — Send Email

# Use case: POST /send-email from a web or mobile app.

# Example Event:

# A POST request hits /send-email with {"to": "a@b.com", "subject": "Hi"}.

# The body is parsed and echoed back. No email is sent yet.

import json
import logging

from function_config import LOG_LEVEL

logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)

HEADERS = {
    'Content-Type': 'application/json',
    'Access-Control-Allow-Origin': '*',
}


def _response(status_code, payload):
    return {
        "statusCode": status_code,
        "headers": dict(HEADERS),
        "body": json.dumps(payload, allow_nan=False),
    }


def _reject_constant(name):
    raise ValueError(f"Invalid JSON constant {name}")


def _body_text(event):
    body = event.get('body') or '{}'
    # Non-string scalars are read as their JSON text
    if isinstance(body, (bool, int, float)):
        return json.dumps(body)
    return body


def _describe(error):
    return str(error) or 'Unknown error'


def handle(event, logger=logger):
    """Parse the event body and answer with an API Gateway proxy response.

    Never raises: any failure becomes a 500 with the error description.
    """
    try:
        logger.info("Event: %s", json.dumps(event, indent=2, default=str))

        # Business logic (template, recipients, SES call) goes here
        body = json.loads(_body_text(event), parse_constant=_reject_constant)

        logger.info("Parsed Body: %s", body)

        return _response(200, {
            "message": "Email sent successfully",
            "data": body,
        })
    except Exception as e:
        logger.error("Error: %s", e, exc_info=True)

        return _response(500, {
            "message": "Error sending email",
            "error": _describe(e),
        })


def lambda_handler(event, context):
    return handle(event)

# Real use:

# Transactional email (receipts, password resets)

# Contact form notifications
