"""Contract helpers: ABI tokens, transaction options, bytecode linking and errors."""