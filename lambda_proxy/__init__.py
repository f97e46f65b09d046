"""
Lambda Proxy.

HTTP endpoint that invokes a named AWS Lambda function synchronously and
relays its response.
"""

__version__ = "1.0.0"
