class FakeLambdaContext:
    function_name = "airdata-export"
    function_version = "$LATEST"
    memory_limit_in_mb = 128
    invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:airdata-export"
    aws_request_id = "00000000-0000-0000-0000-000000000000"
    log_group_name = "/aws/lambda/airdata-export"
    log_stream_name = "stream"

    def get_remaining_time_in_millis(self) -> int:
        return 30_000
