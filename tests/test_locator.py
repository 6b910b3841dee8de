"""Tests for locating the document that governs an interface."""

from netcfg_lib.netplan import DEFAULT_CONFIG_NAME, find_config, list_configs


def test_missing_directory(tmp_path):
    missing = tmp_path / "nope"
    assert list_configs(missing) == []
    assert find_config("eth0", missing) == missing / DEFAULT_CONFIG_NAME


def test_new_interface_gets_default_document(netplan_dir):
    assert find_config("eth0", netplan_dir) == netplan_dir / DEFAULT_CONFIG_NAME


def test_finds_declaring_document(netplan_dir, write_doc):
    write_doc("00-installer.yaml", """
        network:
          version: 2
          ethernets:
            ens3:
              dhcp4: true
        """)
    path = write_doc("50-cloud-init.yaml", """
        network:
          version: 2
          ethernets:
            eth0:
              dhcp4: true
        """)
    assert find_config("eth0", netplan_dir) == path


def test_first_document_wins(netplan_dir, write_doc):
    first = write_doc("10-a.yaml", "network: {version: 2, ethernets: {eth0: {dhcp4: true}}}\n")
    write_doc("20-b.yaml", "network: {version: 2, ethernets: {eth0: {dhcp4: false}}}\n")
    assert find_config("eth0", netplan_dir) == first


def test_similar_names_are_distinct(netplan_dir, write_doc):
    write_doc("10-a.yaml", "network: {version: 2, ethernets: {eth10: {dhcp4: true}}}\n")
    assert find_config("eth1", netplan_dir) == netplan_dir / DEFAULT_CONFIG_NAME


def test_broken_documents_are_skipped(netplan_dir, write_doc):
    write_doc("10-broken.yaml", "network: [unclosed\n")
    path = write_doc("20-good.yaml", "network: {version: 2, ethernets: {eth0: {dhcp4: true}}}\n")
    assert find_config("eth0", netplan_dir) == path


def test_list_configs_ignores_backups(netplan_dir, write_doc):
    path = write_doc("01-netcfg.yaml", "network: {version: 2}\n")
    (netplan_dir / "01-netcfg.yaml.bak.20240101_120000").write_text("network: {version: 2}\n")
    (netplan_dir / "notes.txt").write_text("ignored\n")
    assert list_configs(netplan_dir) == [path]


def test_undecodable_document_is_skipped(netplan_dir, write_doc):
    (netplan_dir / "00-legacy.yaml").write_bytes(b"# caf\xe9\nnetwork: {version: 2}\n")
    path = write_doc("01-netcfg.yaml", "network: {version: 2, ethernets: {eth0: {dhcp4: true}}}\n")
    assert find_config("eth0", netplan_dir) == path
