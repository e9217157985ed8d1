import matplotlib.pyplot as plt
import numpy as np


def display_board(board, title=None, show=True):
    board = np.asarray(board)
    n = board.shape[0]

    fig, ax = plt.subplots()
    plt.title(title or f"{n}-queens")

    # checkerboard background, then one square per queen
    ax.imshow(np.indices((n, n)).sum(axis=0) % 2, cmap="Greys", alpha=0.2,
              extent=(0, n, n, 0))
    for row, col in np.argwhere(board > 0):
        queen = plt.Rectangle((col + 0.15, row + 0.15), 0.7, 0.7,
                              edgecolor="#333", facecolor="#69b3a2", alpha=0.8)
        ax.add_patch(queen)

    ax.set_xlim(0, n)
    ax.set_ylim(n, 0)
    ax.set_xticks(range(n + 1))
    ax.set_yticks(range(n + 1))
    ax.set_xlabel('column')
    ax.set_ylabel('row')

    # display plot
    if show:
        plt.show()
    return ax
