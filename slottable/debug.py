from .shared import printf
from .table import Status, Table

# names as shown in the slot listing
STATUS_NAMES = {
    Status.NEVER_USED: "NeverUsed",
    Status.TOMBSTONED: "TombStoned",
    Status.OCCUPIED: "Occupied",
}


def print_table(table: Table):
    for index, key, status in table.entries():
        print_slot(index, key, status)


def print_slot(index: int, key: str, status: Status):
    printf('{0:d}: ("{1:s}", {2:s})\n', index, key, STATUS_NAMES[status])


def print_occupied(table: Table):
    printf("== {0:d}/{1:d} occupied ==\n", table.count(), len(table.slots))
    for index, key, status in table.entries():
        if status == Status.OCCUPIED:
            print_slot(index, key, status)
