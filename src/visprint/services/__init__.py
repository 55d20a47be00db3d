from .compare_service import compare, hamming_distance
from .fingerprint_service import fingerprint_or_none, generate_fingerprint
from .report_service import ReportService
from .scan_service import ScanService
from .similarity_service import SimilarityEdge, SimilarityService


__all__ = [
    'compare',
    'hamming_distance',
    'fingerprint_or_none',
    'generate_fingerprint',
    'ReportService',
    'ScanService',
    'SimilarityEdge',
    'SimilarityService',
]
