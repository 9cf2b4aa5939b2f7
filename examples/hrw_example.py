from hrw import top_n


def main():
    # given a set of servers
    servers = {
        1: "one.example.com",
        2: "two.example.com",
        3: "three.example.com",
        4: "four.example.com",
        5: "five.example.com",
        6: "six.example.com",
    }

    # HRW consistently selects a uniformly distributed set of servers for
    # any given key, regardless of the order the ids are supplied in
    key = b"/examples/object-key"
    for server_id in top_n(servers.keys(), key, 3):
        print(f"trying GET {server_id} {servers[server_id]}{key.decode()}")


if __name__ == "__main__":
    main()
