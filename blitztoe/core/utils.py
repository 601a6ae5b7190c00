def print_info(move, nodes, show_nodes=True):
    print(f"Best move: {move}")
    if show_nodes:
        print(nodes)


def print_board(board, marks):
    for row in board.rows(*marks):
        print(row)
    print()
