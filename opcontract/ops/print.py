OP_TYPE = 'Print'

def init_schema(op):
    op.num_inputs(1).num_outputs(0)
