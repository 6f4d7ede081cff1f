# convert rows of arbitrary objects to tabular row strings
def tabulate(rows, sep, do_left_justify=True):
    n = len(rows[0])
    w = [max(len(str(row[c])) for row in rows) for c in range(n)]
    if do_left_justify:
        t = [sep.join(f'{str(row[c]):<{w[c]}s}' for c in range(n))
                for row in rows]
    else:
        t = [sep.join(f'{str(row[c]):>{w[c]}s}' for c in range(n))
                for row in rows]
    return t

def schema_report(op_type, schema):
    """
    Produce the lines describing the contract of {op_type}
    """
    lines = [f'Schema for \'{op_type}\'']
    lines.extend('  ' + line for line in tabulate(schema.inventory(), '   '))
    return lines

def violations_report(failures):
    """
    Summarize a list of (opdef, status) pairs, one line per failure
    """
    if len(failures) == 0:
        return ['All operators passed']
    rows = [ (f'{opdef.op_type}', status.kind.name, status.message(opdef))
            for opdef, status in failures ]
    return tabulate(rows, '  ')
