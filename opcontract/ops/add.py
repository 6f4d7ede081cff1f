OP_TYPE = 'Add'

def init_schema(op):
    # either operand may be overwritten by the result
    op.num_inputs(2).num_outputs(1).allow_inplace({(0, 0), (1, 0)})
