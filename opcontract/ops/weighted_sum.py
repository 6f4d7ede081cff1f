OP_TYPE = 'WeightedSum'

def init_schema(op):
    """
    Inputs come in (X_0, weight_0, X_1, weight_1, ...) pairs
    """
    def even_positive(n):
        return n > 0 and n % 2 == 0

    op.num_inputs(even_positive).num_outputs(1).allow_inplace({(0, 0)})
