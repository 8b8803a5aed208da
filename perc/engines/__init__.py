"""
Engines

Pure computation for the single-neuron classifier:

- random_source         RandomSource protocol + numpy-backed stream
- activation            Model / Example / Convention, net(), activate()
- weight_init_engine    initial (w1, w2, bias) from a DistributionSpec
- train_engine          perceptron / ADALINE epoch loop
- data_generator_engine AND / OR / XOR sample synthesis
- evaluate_engine       evaluate() / validate()

Engines do NOT do file I/O. Files are read and written by
perc.dataloader and perc.artifacts at the CLI boundary.

The random stream is always passed in explicitly. Draw order is part
of the contract: reseeding with the same seed reproduces the same
weights, traces and generated samples.
"""
