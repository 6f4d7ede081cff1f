OP_TYPE = 'Copy'

def init_schema(op):
    op.num_inputs(1).num_outputs(1)
