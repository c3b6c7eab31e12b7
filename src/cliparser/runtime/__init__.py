from cliparser.runtime.argv import parse_process_args, read_process_args

__all__ = ['parse_process_args', 'read_process_args']
