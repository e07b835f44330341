from py_ecc import optimized_bls12_381, optimized_bn128

BN254_MODULUS = optimized_bn128.field_modulus
BN254_SCALAR_FIELD = optimized_bn128.curve_order

BLS12_381_MODULUS = optimized_bls12_381.field_modulus
BLS12_381_SCALAR_FIELD = optimized_bls12_381.curve_order
