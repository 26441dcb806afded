# bbsctl

`bbsctl` manages a BigBlueSwarm cluster from the command line. It lists the
BigBlueButton instances and tenants of the cluster, shows cluster health,
describes the server configuration and tenants, deletes tenants, creates
resource file templates, and applies resource files to the cluster.

## Installation

```
pip install .
```

This installs the `bbsctl` command.

## Configuration

`bbsctl` reads a YAML file holding the BigBlueSwarm URL and the admin API key:

```yaml
bbs: http://bbs.example.com
apiKey: placeholder
```

Create it with:

```
bbsctl init config --bbs http://bbs.example.com --key placeholder
```

The file is written to `~/.bigblueswarm/.bbsctl.yml` unless `--dest` names
another folder. `init config` refuses to overwrite an existing file.

Every command other than `init` loads this file first; pass `--config <path>`
to read a different one. If the file cannot be read or parsed, the error is
printed and `bbsctl` exits with code 2. Any invocation whose arguments contain
the text `init` is treated as an init command and loads no configuration.

## Usage

```
bbsctl cluster-info                 # API status, tenants, CPU, memory, meetings, participants
bbsctl get instances [--csv|--json] # list BigBlueButton instances
bbsctl get tenants [--csv|--json]   # list tenants with their instance counts
bbsctl describe config              # print the BigBlueSwarm configuration as YAML
bbsctl describe tenant <hostname>   # print one tenant as YAML
bbsctl delete tenant <hostname>     # remove a tenant
bbsctl init instances               # create an instances.yml template
bbsctl init tenant --host <host>    # create a <host>.tenant.yml template
bbsctl apply -f <file>              # push an InstanceList or Tenant file
```

Notes:

- `get` prints a borderless table by default; `--csv` prints comma separated
  values and `--json` prints indented JSON (`--json` wins if both are given).
- `cluster-info` colours CPU and memory green below 33.33 %, yellow below
  66.66 %, and red above that; the API status is green when `Up`, red otherwise.
- `init instances` and `init tenant` write to `~/.bigblueswarm` unless `--dest`
  names another folder, and refuse to overwrite an existing file.
- `init tenant` also accepts `--secret`, `--meeting_pool` and `--user_pool`;
  a pool value of `-1` (the default) leaves the limit out of the file.
- `apply` accepts only documents whose `kind` is `InstanceList` or `Tenant`
  and prints `<kind> resource created` on success.
- Running `bbsctl`, `bbsctl get`, `bbsctl describe`, `bbsctl delete` or
  `bbsctl init` without a subcommand prints its help.

## Using it from Python

`bbsctl.admin.AdminClient(bbs, api_key, session=None)` wraps the admin API.
Its methods are `list_instances`, `add`, `delete`, `cluster_status`,
`api_status`, `get_configuration`, `get_tenants`, `get_tenant`,
`delete_tenant` and `apply`; failures raise `bbsctl.admin.AdminError`.
`bbsctl.config.load_config(path)` reads a configuration file into a
`Config` with `bbs` and `api_key` fields.

## What it does not do

There is no command to add or remove a single BigBlueButton instance;
`AdminClient.add` and `AdminClient.delete` offer this only from Python.
Instances are otherwise managed by applying an `InstanceList` file.

## Exit codes

- `0`: success
- `1`: a command failed; the message is printed to standard error
- `2`: the configuration file could not be loaded, or the arguments were invalid

## Development

```
pip install -e ".[test]"
pytest
```