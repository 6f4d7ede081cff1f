OP_TYPE = 'Concat'

def init_schema(op):
    # second output records the size of each input along the axis
    op.num_inputs(1, None).num_outputs(2)
