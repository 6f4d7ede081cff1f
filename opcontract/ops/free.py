OP_TYPE = 'Free'

def init_schema(op):
    op.num_inputs(1, None).same_number_of_output()
    op.allow_one_to_one_inplace().enforce_one_to_one_inplace()
