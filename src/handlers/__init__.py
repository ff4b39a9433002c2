"""
Lambda handlers package for AWS Lambda functions.

Each module exposes a ``handler(event, context)`` for one API Gateway
resource group.
"""
