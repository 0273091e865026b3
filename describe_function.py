import sys

import boto3

import function_config as cfg

VERIFICATION_BATCH = 100

CHECKED_FIELDS = {
    "Handler": cfg.HANDLER,
    "Runtime": cfg.RUNTIME,
    "Timeout": cfg.TIMEOUT_SECONDS,
}


def get_function_summary(lambda_client, function_name):
    conf = lambda_client.get_function_configuration(FunctionName=function_name)
    return {
        key: conf.get(key)
        for key in ("FunctionName", "Handler", "Runtime", "Timeout", "LastModified")
    }


def find_drift(summary):
    """Fields where the deployed function differs from function_config."""
    return [
        f"{field}: deployed={summary.get(field)!r} declared={declared!r}"
        for field, declared in CHECKED_FIELDS.items()
        if summary.get(field) != declared
    ]


def list_ses_identities(ses_client):
    identities = [
        identity
        for page in ses_client.get_paginator("list_identities").paginate()
        for identity in page["Identities"]
    ]

    verified = []
    # get_identity_verification_attributes takes at most 100 identities
    for start in range(0, len(identities), VERIFICATION_BATCH):
        batch = identities[start:start + VERIFICATION_BATCH]
        attrs = ses_client.get_identity_verification_attributes(Identities=batch)
        status = attrs["VerificationAttributes"]
        verified += [
            identity for identity in batch
            if status.get(identity, {}).get("VerificationStatus") == "Success"
        ]
    return verified


def main():
    lambda_client = boto3.client("lambda", region_name=cfg.AWS_REGION)
    ses = boto3.client("ses", region_name=cfg.AWS_REGION)

    try:
        summary = get_function_summary(lambda_client, cfg.FUNCTION_NAME)
    except lambda_client.exceptions.ResourceNotFoundException:
        print(f"❌ Lambda function {cfg.FUNCTION_NAME} not found in {cfg.AWS_REGION}")
        return 1

    print("Lambda Function:")
    for key, value in summary.items():
        print(f" - {key}: {value}")

    drift = find_drift(summary)
    print("\nDrift from declaration:")
    for line in drift or ["none"]:
        print(" -", line)

    print("\nVerified SES identities:")
    for identity in list_ses_identities(ses):
        print(" -", identity)
    return 0


if __name__ == "__main__":
    sys.exit(main())
