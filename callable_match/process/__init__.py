# Path: callable_match/process/__init__.py
"""
Process Layer for callable_match

The PROCESS layer evaluates matchers against callable descriptors:
- matcher/models/ - Descriptor and result data structures
- matcher/evaluators/ - One matcher per predicate
- matcher/engine/ - Assertions raising on failed verdicts

All components follow the IPO pattern:
- Read from INPUT layer (loaders building descriptors)
- Process data (predicate evaluation)
- Hand off to OUTPUT (assertion failures)
"""
