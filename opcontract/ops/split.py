OP_TYPE = 'Split'

def init_schema(op):
    # the optional second input holds the split sizes
    op.num_inputs(1, 2).num_outputs(1, None)
