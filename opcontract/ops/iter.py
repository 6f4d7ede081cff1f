OP_TYPE = 'Iter'

def init_schema(op):
    """
    Increments a counter in place.  With no input, the output blob is
    created.
    """
    op.num_inputs(0, 1).num_outputs(1)
    op.allow_inplace({(0, 0)}).enforce_inplace({(0, 0)})
