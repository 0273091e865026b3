# template_builder.py
from pathlib import Path

import function_config as cfg


def render_template():
    """Return a SAM template.yaml for the sendEmail function, built from function_config."""
    policies = ""
    for statement in cfg.IAM_STATEMENTS:
        actions = "".join(f"\n                - {action}" for action in statement["Action"])
        policies += f"""
            - Effect: {statement["Effect"]}
              Action:{actions}
              Resource: '{statement["Resource"]}'"""

    cors = """
  Api:
    Cors:
      AllowMethods: "'OPTIONS,POST'"
      AllowHeaders: "'Content-Type'"
      AllowOrigin: "'*'"
""" if cfg.CORS else ""

    return f"""AWSTemplateFormatVersion: '2010-09-09'
Transform: AWS::Serverless-2016-10-31
Description: Send email function (auto-generated)

Globals:{cors or " {}"}
Resources:
  SendEmailFunction:
    Type: AWS::Serverless::Function
    Properties:
      FunctionName: {cfg.FUNCTION_NAME}
      Runtime: {cfg.RUNTIME}
      Handler: {cfg.HANDLER}
      CodeUri: ./
      Timeout: {cfg.TIMEOUT_SECONDS}
      Environment:
        Variables:
          LOG_LEVEL: {cfg.LOG_LEVEL}
      Policies:
        - Version: '2012-10-17'
          Statement:{policies}
      Events:
        SendEmail:
          Type: Api
          Properties:
            Path: {cfg.HTTP_PATH}
            Method: {cfg.HTTP_METHOD}
"""


def generate_template(out_path="template.yaml"):
    path = Path(out_path)
    path.write_text(render_template(), encoding="utf-8")
    print(f"Wrote {path} for {cfg.FUNCTION_NAME} ({cfg.HTTP_METHOD.upper()} {cfg.HTTP_PATH}).")
    return path


if __name__ == "__main__":
    generate_template()
