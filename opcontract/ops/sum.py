OP_TYPE = 'Sum'

def init_schema(op):
    op.num_inputs(1, None).num_outputs(1).allow_inplace({(0, 0)})
