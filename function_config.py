# Function Declaration — sendEmail

# Route, timeout and permissions for the send-email Lambda.
# template_builder.py renders these into a SAM template and
# describe_function.py checks the deployed function against them.

import os

# --- Environment Variables ---
FUNCTION_NAME = os.environ.get('FUNCTION_NAME', 'sendEmail')
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
AWS_REGION = os.environ.get('AWS_REGION', 'us-east-1')

# --- Lambda ---
HANDLER = 'send_email.lambda_handler'
RUNTIME = 'python3.12'
TIMEOUT_SECONDS = 90

# --- API Gateway ---
HTTP_PATH = '/send-email'
HTTP_METHOD = 'post'
CORS = True

# --- IAM ---
# Not used by the handler yet; granted for when delivery goes through SES.
IAM_STATEMENTS = [
    {
        'Effect': 'Allow',
        'Action': ['ses:SendEmail', 'ses:SendRawEmail'],
        'Resource': '*',
    },
]

# Environment Variables (in Lambda Configuration)

# Variable	Example
# FUNCTION_NAME	sendEmail
# LOG_LEVEL	DEBUG
# AWS_REGION	eu-west-1
