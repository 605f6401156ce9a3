from softxent.function.Function import Function
