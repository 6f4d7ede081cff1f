import fire
import logging
import sys
import opcontract

def _load():
    registry = opcontract.default_registry()
    if not registry.frozen:
        opcontract.init(registry=registry)
    return registry

def list_schemas():
    print('Available schemas')
    for op_type in _load().names():
        print(op_type)

def explain(op_type):
    _load()
    print('\n'.join(opcontract.explain(op_type)))

def _check_opdefs(opdefs, strict):
    failures = opcontract.check_all(opdefs, strict)
    print('\n'.join(opcontract.report.violations_report(failures)))
    if failures:
        sys.exit(1)

def check(opdef_text, strict=False):
    """
    Check an operator written as 'Type(in0, in1) -> (out0)' against its
    registered schema
    """
    _load()
    opdef = opcontract.parse_opdef(opdef_text)
    _check_opdefs([opdef], strict)

def check_file(path, strict=False):
    """
    Check every operator in {path}, one per line.  Lines starting with '#'
    are skipped.
    """
    _load()
    opdefs = []
    with open(path, 'r') as fh:
        for line in fh:
            line = line.strip()
            if line == '' or line.startswith('#'):
                continue
            opdefs.append(opcontract.parse_opdef(line))
    _check_opdefs(opdefs, strict)

def main():
    if len(sys.argv) < 2:
        print('Usage: opcontract <list|explain|check|check_file> [args] '
                '[--log_level=LEVEL]')
        return 1
    cmd = sys.argv.pop(1)
    log_level = 'WARNING'
    for arg in list(sys.argv[1:]):
        if arg.startswith('--log_level='):
            log_level = arg.split('=', 1)[1]
            sys.argv.remove(arg)
    logging.basicConfig(level=log_level.upper(),
            format='%(levelname)s %(name)s: %(message)s')

    func_map = {
            'list': list_schemas,
            'explain': explain,
            'check': check,
            'check_file': check_file
            }
    func = func_map.get(cmd, None)
    if func is None:
        avail = ', '.join(func_map.keys())
        print(f'Couldn\'t understand subcommand \'{cmd}\'.  Use one of: {avail}')
        return 1
    fire.Fire(func)

if __name__ == '__main__':
    sys.exit(main())
