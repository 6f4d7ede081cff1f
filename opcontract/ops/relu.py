OP_TYPE = 'Relu'

def init_schema(op):
    op.num_inputs(1).num_outputs(1).allow_inplace({(0, 0)})
