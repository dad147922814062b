from statements.services.statement_service import StatementService, compute_statement

__all__ = ["StatementService", "compute_statement"]
