import pickle as pkl

from absl import logging

from softxent.function.loss import BinaryCrossEntropyLoss, LossFunction

LOSS_FUNCTIONS = {
    BinaryCrossEntropyLoss.__name__: BinaryCrossEntropyLoss,
}


class Checkpoint:
    """Pickled config of a loss function. Arrays are stored as plain lists, never as mlx arrays."""

    def __init__(self, config=None):
        self.config: dict | None = config

    @staticmethod
    def of(loss_fn: LossFunction) -> "Checkpoint":
        return Checkpoint(loss_fn.to_config())

    def restore(self) -> LossFunction:
        if self.config is None:
            raise ValueError("Checkpoint is empty")
        class_name = self.config.get("class_name")
        if class_name not in LOSS_FUNCTIONS:
            raise ValueError(f"Unknown loss function {class_name!r} in checkpoint")
        return LOSS_FUNCTIONS[class_name].from_config(self.config)

    def write(self, path):
        logging.info('Saving loss function checkpoint to %s', path)
        with open(path, "wb") as file:
            pkl.dump(self.config, file)

    @staticmethod
    def read(path):
        logging.info('Loading loss function checkpoint from %s', path)
        ckp = Checkpoint()
        with open(path, "rb") as file:
            ckp.config = pkl.load(file)
        return ckp
