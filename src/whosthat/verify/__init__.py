"""Post-redaction verification."""

from .scanner import ResidualFinding, VerificationReport, scan_text

__all__ = ["ResidualFinding", "VerificationReport", "scan_text"]
