class IndexOutOfRange(IndexError):
    """Raised by HashMap.get_bucket for an index outside 0..bucket_count - 1."""

    def __init__(self, index: int, bucket_count: int):
        self.index = index
        self.bucket_count = bucket_count
        super().__init__(f"bucket index {index} out of range for {bucket_count} buckets")
