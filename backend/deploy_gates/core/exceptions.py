class DeployGatesError(Exception):
    """Base exception for the deployment gates package."""

    pass


class CommentConflictError(DeployGatesError):
    """Raised when a comment id is re-used with different content on the same gate."""

    def __init__(self, gate_key, comment_id: str):
        self.gate_key = gate_key
        self.comment_id = comment_id
        super().__init__(
            f"Comment '{comment_id}' already exists on gate "
            f"{gate_key.group}/{gate_key.service}/{gate_key.environment} with different content"
        )


class DuplicateGateError(DeployGatesError):
    """Raised when two gates with the same key are folded into one gate tree."""

    def __init__(self, gate_key):
        self.gate_key = gate_key
        super().__init__(
            f"Duplicate gate {gate_key.group}/{gate_key.service}/{gate_key.environment}"
        )
