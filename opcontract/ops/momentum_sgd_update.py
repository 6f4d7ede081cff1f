OP_TYPE = 'MomentumSGDUpdate'

def init_schema(op):
    """
    Inputs: grad, moment, lr, param.  Outputs: output_grad, output_moment,
    output_param
    """
    op.num_inputs(4).num_outputs(3)
    op.allow_inplace({(0, 0), (1, 1), (3, 2)})
