""" File to store names for different metrics captured """

import enum


class BatchMetrics(enum.Enum):
    BATCH_NUM_ROWS = "batch_num_rows"
    BATCH_SUBMIT_TIME = "batch_submit_time"
    BATCH_COMMIT_TIME = "batch_commit_time"
