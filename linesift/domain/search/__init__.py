from .invocation_builder import InvocationBuilder
from .result_assembler import ResultAssembler, AssemblyStats
from .search_domain_service import SearchDomainService

__all__ = [
    'InvocationBuilder',
    'ResultAssembler',
    'AssemblyStats',
    'SearchDomainService'
]
