"""Terminal dashboard for AWS Lambda functions and their CloudWatch logs."""
