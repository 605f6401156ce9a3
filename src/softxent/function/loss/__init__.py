from softxent.function.loss.LossFunction import LossFunction
from softxent.function.loss.BinaryCrossEntropyLoss import BinaryCrossEntropyLoss
from softxent.function.loss.serde import row_vector_to_list, list_to_row_vector
